from setuptools import setup, find_packages

with open('requirements.txt') as f:
    required = f.read().splitlines()

setup(
    name = 'appenv',
    version = '0.1.0',
    description = 'Write-once environment configuration for multi-flavor applications',
    packages = find_packages(exclude=['test', 'test.*']),
    python_requires = '>=3.10',
    install_requires = required,
    extras_require = {
        'test': ['pytest', 'pytest-cov']
    },
    entry_points = {
        'console_scripts': [
            'appenv = appenv.bootstrap:main',
            'appenv-dev = appenv.bootstrap:main_dev',
            'appenv-uat = appenv.bootstrap:main_uat',
            'appenv-prod = appenv.bootstrap:main_prod',
        ]
    }
)
