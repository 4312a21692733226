from setuptools import setup, find_packages

setup(
    name='pulseconfig',
    version='1.0.0',
    description='Configuration table queries for the Pulse BigQuery dataset',
    python_requires='>=3.10',
    include_package_data=True,
    packages=find_packages(),
    package_data={'pulseconfig.queries': ['*.sql']},
    install_requires=[
        'pandas >= 0.19.2',
        'google-cloud-bigquery >= 3.27.0',
        'db-dtypes >= 1.0.0',
    ],
    extras_require={
        'test': ['pytest >= 7.0'],
    },
)
