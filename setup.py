# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="cssns",
    version="1.0.0",
    description="Namespaced CSS class names for declarative UI element trees",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["cssns*"]),  # subpackages carry no __init__.py
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
