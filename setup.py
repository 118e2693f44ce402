from setuptools import setup, find_packages


DISTNAME = 'histobins'
DESCRIPTION = "Histogram bins aligned on nice tick values"
LONG_DESCRIPTION = open('README.rst').read()
MAINTAINER = 'histobins developers'
MAINTAINER_EMAIL = ''
LICENSE = 'BSD-3-Clause'
VERSION = '0.1.0'

setup(
    name=DISTNAME,
    maintainer=MAINTAINER,
    maintainer_email=MAINTAINER_EMAIL,
    description=DESCRIPTION,
    license=LICENSE,
    version=VERSION,
    long_description=LONG_DESCRIPTION,
    package_dir={'': 'src'},
    packages=find_packages('src'),
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.8',
    classifiers=[
        'Intended Audience :: Science/Research',
        'Intended Audience :: Developers',
        'Programming Language :: Python',
        'Topic :: Software Development',
        'Topic :: Scientific/Engineering',
        'Operating System :: OS Independent',
    ],
    install_requires=['numpy'],
    extras_require={'test': ['pytest', 'scipy']},
)
