from setuptools import setup, find_packages

with open("README.md", "r") as f:
    long_description = f.read()

setup(
    name="urlparts",
    version="1.0.0",
    author="Dominick C. Pastore",
    description="Split URL-like strings into protocol, domains, path, query "
                "string, and fragment",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="GPLv3+",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: "
        "GNU General Public License v3 or later (GPLv3+)",
        "Topic :: Internet :: WWW/HTTP",
        "Topic :: Internet :: Name Service (DNS)",
    ],

    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "tldextract",
    ],
    python_requires=">=3.8",
    extras_require={
        "test": [
            "flake8",
            "pytest",
            "pytest-cov",
            "pytest-mock",
        ]
    },

    entry_points={
        "console_scripts": [
            "urlparts=urlparts.main:main",
        ],
    },
)
