import os

from setuptools import setup, find_packages

with open(os.path.join(os.path.dirname(__file__), "readme.md"), "r") as fh:
    long_description = fh.read()

setup(
    name='scooters',
    version='1.0.0',
    license='MIT',
    description='Scooter rental bookkeeping with capped per-minute pricing.',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires='>=3.7',
    install_requires=[
        'attrs',
        'marshmallow>=3.8',
        'dateparser',
    ],
    extras_require={
        'test': ['pytest', 'Faker'],
    },
    entry_points={
        'console_scripts': ['scooters=scooters.cli:main'],
    },
)
