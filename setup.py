"""
Xorscope Setup Configuration
Cryptanalysis toolkit for single-byte and repeating-key XOR ciphers
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="xorscope",
    version="1.0.0",
    author="Xorscope Contributors",
    description="Hex/Base64 codecs, XOR transforms and repeating-key XOR breaking",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Education",
        "Intended Audience :: Information Technology",
        "Topic :: Security :: Cryptography",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=[
        # Core functionality uses only stdlib
        # Optional dependencies for the API
    ],
    extras_require={
        "api": ["fastapi>=0.104.0", "uvicorn>=0.24.0", "python-multipart>=0.0.6"],
        "dev": [
            "pytest>=7.4.0",
            "hypothesis>=6.82.0",
            "fastapi>=0.104.0",
            "python-multipart>=0.0.6",
            "httpx>=0.25.0",
        ],
        "all": ["fastapi>=0.104.0", "uvicorn>=0.24.0", "python-multipart>=0.0.6"],
    },
    entry_points={
        "console_scripts": [
            "xorscope=xorscope.cli:main",
        ],
    },
)
