#!/usr/bin/env python3
"""
Setup script for smsencoding.
"""

from setuptools import setup, find_packages

setup(
    name="smsencoding",
    version="0.1.0",
    description="GSM 03.38 SMS encoding, septet/octet counting and multi-part segmentation",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    license="MIT",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "sms-encoding=smsencoding.cli:main",
        ],
    },
    keywords=["sms", "gsm", "gsm-03.38", "gsm7", "ucs2", "septets", "concatenated-sms"],
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Communications",
        "Topic :: Communications :: Telephony",
        "Operating System :: OS Independent",
        "License :: OSI Approved :: MIT License",
    ],
)
