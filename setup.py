"""A setuptools module for seisread.
See:
https://packaging.python.org/en/latest/distributing.html
https://github.com/pypa/sampleproject
"""

# Always prefer setuptools over distutils
from setuptools import setup


setup(
    name="seisread",
    version="1.0.0",
    description="A library to read and write SEG-Y seismic files",
    license="MIT",
    keywords="segy seg-y seismic ibm float",
    python_requires='>=3.6',
    install_requires=[
                      'numpy',
                      'construct>=2.10',
                     ],
    extras_require={
        'test': ['testfixtures'],
    },
    classifiers=[
        # How mature is this project? Common values are
        #   3 - Alpha
        #   4 - Beta
        #   5 - Production/Stable
        "Development Status :: 4 - Beta",

        # Indicate who your project is intended for
        'Environment :: Console',
        'Intended Audience :: Science/Research',
        'Topic :: Scientific/Engineering :: Physics',

        # Pick your license as you wish (should match "license" above)
        'License :: OSI Approved :: MIT License',

        'Programming Language :: Python :: 3',
    ],
    entry_points={
        'console_scripts': [
            'dumpsgy = seisread.utilities.dumpsgy:main',
            'settext = seisread.utilities.settext:main',
        ],
    },
    packages=['seisread',
              'seisread.core',
              'seisread.utilities'],
)
