from setuptools import find_packages, setup

setup(
    name="identity_gateway",
    version="0.1.0",
    packages=find_packages(),
    include_package_data=True,
    package_data={
        "identity_gateway_app": ["templates/identity_gateway_app/*.html"],
    },
    install_requires=[
        "Django==4.2.16",
        "django-cors-headers==4.4.0",
        "djangorestframework==3.15.2",
        "requests",
        "python-dotenv",
        "gunicorn",
    ],
    extras_require={
        "test": [
            "pytest>=7",
            "pytest-django",
        ],
    },
    entry_points={
        "console_scripts": [
            "manage = identity_gateway.manage:main",
        ],
    },
    classifiers=[
        "Environment :: Web Environment",
        "Framework :: Django",
        "Framework :: Django :: 4.2",
        "Intended Audience :: Developers",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Topic :: Internet :: WWW/HTTP",
        "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
    ],
)
