from setuptools import setup

setup(name='vec2',
      version='1.0',
      description='Mutable 2D vector math with Cartesian and polar coordinates',
      packages=['vec2'],
      py_modules=['run_demo'],
      python_requires='>=3.9',
      install_requires=['pygame'],
      extras_require={'test': ['pytest']},
      entry_points={'console_scripts': ['vec2-demo = run_demo:main']})
