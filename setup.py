import os
import re

from setuptools import setup


def get_version():
    module_init = 'colorblend/version.py'

    if not os.path.isfile(module_init):
        module_init = '../' + module_init
        if not os.path.isfile(module_init):
            raise ValueError('Unable to determine version!')

    return re.search(r'__version__\s*=\s*[\'"]([^\'"]*)[\'"]',
                     open(module_init).read()).group(1)


setup(name='colorblend',
      version=get_version(),
      description='W3C compositing and blend modes for RGBA colors',
      author='colorblend Developers',
      license='LGPL',
      packages=['colorblend', 'colorblend.client', 'colorblend.client.commands'],
      entry_points={
          'console_scripts': [
              'colorblend = colorblend.client.main:cli_entry'
          ]
      },
      python_requires='>=3.10',
      install_requires=['argcomplete', 'coloraide', 'colorlog', 'frozendict',
                        'numpy', 'traitlets', 'wrapt'],
      extras_require={
          'test': ['pytest']
      },
      keywords='color blend blending compositing alpha w3c',
      include_package_data=True,
      zip_safe=False,
      classifiers=[
          'Development Status :: 4 - Beta',
          'Intended Audience :: Developers',
          'License :: OSI Approved :: GNU Lesser General Public License v3 (LGPLv3)',
          'Programming Language :: Python :: 3 :: Only',
          'Topic :: Multimedia :: Graphics'
      ])
