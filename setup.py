from setuptools import find_packages, setup

setup(
    name='whatwg-infra',
    version='0.1.0',
    description='Code point classification, string operations and position-variable scanning per the WHATWG Infra Standard',
    license='MIT',
    python_requires='>=3.10', # Structural pattern matching (`match`) is used
    package_dir={ '': 'src' },
    packages=find_packages('src'),
    package_data={ 'whatwg_infra': [ 'py.typed' ] },
    extras_require={ 'test': [ 'pytest' ], 'typing': [ 'mypy' ] },
)
