""" ecdlp build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import ecdlp

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=ecdlp.name,
    version=ecdlp.__version__,
    license=ecdlp.__license__,
    author=ecdlp.__author__,
    author_email=ecdlp.__author_email__,
    description="Elliptic curve discrete logarithm over small prime fields",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    extras_require={"test": ["pytest"]},
    keywords=(
        "elliptic-curves finite-fields diffie-hellman discrete-logarithm "
        "baby-step-giant-step cryptography education"
    ),
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
