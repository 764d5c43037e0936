"""Package build script"""
import re
import setuptools

ver_file = 'VERSION'

# Pull package version number from the VERSION file
with open(ver_file, 'r', encoding='utf-8') as f:
    verstr = re.match(r'^\s*(\d+\.\d+\.\d+(?:\.[a-zA-Z0-9]+)?)\s*$', f.read())

if verstr is None:
    raise EnvironmentError(f'Could not find valid version number in {ver_file}; aborting setup')

__version__ = verstr.groups()[0]

with open("./README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="geoframes",
    version=__version__,
    description="Conversions between geodetic, ECEF, East-North-Up and heading-aligned frames.",
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=setuptools.find_packages(
        include=('geoframes*', ),
        exclude=('*tests', 'tests*')
    ),
    package_data={"geoframes": ["py.typed"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent"
    ],
    python_requires='>=3.8',
    install_requires=[
        'numpy>=1.21',
    ],
    extras_require={
        'test': [
            'pytest',
            'pyproj',
        ],
    },
)
