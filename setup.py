import re

import setuptools


with open("README.md", "r") as fh:
    long_description = fh.read()

with open("tfc_executor/__init__.py", "r") as fh:
    version = re.search(r'^__version__ = "(.+)"', fh.read(), re.M).group(1)

setuptools.setup(
    name="tfc_executor",
    version=version,
    license="MIT",
    keywords="Terraform TFC variables tfvars",
    description="Assemble and render Terraform input variables for job executions",
    long_description_content_type="text/markdown",
    long_description=long_description,
    packages=setuptools.find_packages(include=["tfc_executor", "tfc_executor.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Libraries",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    extras_require={
        "dev": ["black", "twine", "wheel"],
        "test": ["pytest", "coverage", "pytest-cov", "requests-mock", "hypothesis"],
    },
    install_requires=["requests", "pydantic>=2.4", "inflection"],
)
