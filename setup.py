from setuptools import setup, find_packages

setup(
    name="beart-site",
    version="0.1",
    package_dir={'': 'app'},
    packages=find_packages('app'),
    include_package_data=True,
    install_requires=[
        'Django>=4.2',
        'djangorestframework>=3.14',
        'django-redis>=5.4',
        'whitenoise>=6.5',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
            'pytest-django>=4.5',
        ],
    },
    python_requires='>=3.10',
)
