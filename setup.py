import io
from os.path import abspath, dirname, join

from setuptools import find_packages, setup


def read(*names, **kwargs):
    """Read file path relative to setup.py (in encoding; default: utf8)"""
    return io.open(
        join(dirname(abspath(__file__)), *names), encoding=kwargs.get('encoding', 'utf8')
    ).read()


setup(
    name='assemblerr',
    version='0.1.0',
    license='GNU Lesser General Public License v3 (LGPLv3)',
    description='Declarative building of pharmacometric models',
    long_description=read('README.rst'),
    long_description_content_type='text/x-rst',
    packages=find_packages('src'),
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.11',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Science/Research',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: GNU Lesser General Public License v3 (LGPLv3)',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3 :: Only',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: 3.13',
        'Topic :: Scientific/Engineering',
    ],
    keywords=[
        'pharmacometrics',
        'nonmem',
    ],
    install_requires=[
        'lark>=1.1.4',
        'sympy>=1.9',
        'networkx>=2.3',
        'appdirs>=1.4.4',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
)
