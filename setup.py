import os
from glob import glob

from setuptools import setup, find_packages

package_name = 'svg_charts'

setup(
    name=package_name,
    version='0.1.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    data_files=[
        (os.path.join('share', package_name, 'config'), glob('config/*.yaml')),
    ],
    install_requires=[
        'numpy',
        'pyyaml',
    ],
    extras_require={
        'test': ['pytest'],
    },
    zip_safe=True,
    author='SVG Charts Team',
    author_email='svg-charts@example.com',
    description='Resolution-independent geometry engine for SVG bar and pie charts',
    license='MIT',
    python_requires='>=3.8',
    tests_require=['pytest'],
    entry_points={
        'console_scripts': [],
    },
)
