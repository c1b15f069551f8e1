#!/usr/bin/env python

from setuptools import setup

with open('README.md') as f:
    readme = f.read()

with open('potalg/core/_version.py') as f:
    exec(f.read())

setup(name='potalg',
      version=__version__,
      description='An algebra of interatomic potentials',
      long_description=readme,
      long_description_content_type="text/markdown",
      author='Daniele Coslovich',
      author_email='daniele.coslovich@umontpellier.fr',
      packages=['potalg', 'potalg.core', 'potalg.potential'],
      install_requires=['numpy'],
      license='GPLv3',
      classifiers=[
          'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
          'Development Status :: 4 - Beta',
          'Intended Audience :: Science/Research',
          'Programming Language :: Python :: 3',
          'Topic :: Scientific/Engineering :: Physics',
      ]
)
