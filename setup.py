import os
import re

import setuptools


def read(fname):
   return open(os.path.join(os.path.dirname(__file__), fname)).read()


def version():
   return re.search(r'^__version__ = "([^"]+)"', read("simple_player/__init__.py"), re.M).group(1)


setuptools.setup(
   name='simple-player',
   version=version(),
   description='Background service playing a local audio library track after track',
   long_description=read('README.md'),
   long_description_content_type="text/markdown",
   license="BSD2",
   keywords="music player playlist android vlc",
   packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
   install_requires=[
      'krozark-current-platform',
   ],
   extras_require={
      'desktop': ['python-vlc'],
      'test': ['pytest'],
   },
   classifiers=[
      "Programming Language :: Python",
      "Programming Language :: Python :: 3",
      "Operating System :: OS Independent",
    ],
   python_requires='>=3.10',
)
