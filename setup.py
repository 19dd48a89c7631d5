from setuptools import setup, find_packages

setup(
    name='pokelegality',
    version='0.1',
    zip_safe=False,
    packages=find_packages(),
    package_data={
        'pokelegality': ['data/*.yaml']
    },
    install_requires=[
        'construct>=2.10',
        'PyYAML>=5.1',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'pokelegality = pokelegality.main:setuptools_entry',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.12",
    ]
)
