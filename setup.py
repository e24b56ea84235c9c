from setuptools import setup

with open("README.md", 'r') as f:
    long_description = f.read()

setup(
   name='crypmon',
   version='1.0',
   description='Multi-client predicate-only encryption for conjunctive equality tests',
   license="MIT",
   long_description=long_description,
   long_description_content_type="text/markdown",
   packages=['crypmon'],  #same as name
   python_requires='>=3.6',
   install_requires=[
        'petrelic>=0.1.5',
       ], #external packages as dependencies
   extras_require={
        'test': ['pytest'],
       },
)
