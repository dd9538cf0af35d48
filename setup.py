from setuptools import setup, find_packages

__version__ = '0.3.0'

requirements = [
    'coloredlogs>=15.0',
]

test_requirements = [
    'pytest>=7.0',
]

setup(
    name='gridledger',
    version=__version__,
    description='Tamper-evident pixel grid ledger with escrowed payouts.',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=requirements,
    extras_require={
        'test': test_requirements,
    },
    python_requires='>=3.8',
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
    zip_safe=True,
    include_package_data=True,
)
