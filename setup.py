"""
Setup configuration for the Contact Form Lambda package.

This package contains the AWS Lambda handler that validates contact form
submissions with Cloudflare Turnstile and delivers them through Amazon SES.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="contact-form-lambda",
    version="1.0.0",
    description="AWS Lambda contact form handler with Turnstile verification and SES delivery",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Communications :: Email",
    ],
    python_requires=">=3.9",
    install_requires=[
        "boto3>=1.34.0",
        "botocore>=1.34.0",
        "urllib3>=1.26.0,<2.5",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "moto[ses]>=5.0.0",
            "black>=23.0.0",
            "mypy>=1.5.0",
            "flake8>=6.0.0",
        ],
    },
    keywords="aws lambda ses api-gateway contact-form turnstile",
)
