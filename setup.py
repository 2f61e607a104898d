from setuptools import setup, find_packages

with open("README.md", encoding="utf-8") as readme_file:
    README = readme_file.read()

REQUIREMENTS = [
    "numpy >= 1.15.2",
    "progressbar2 >= 3.38.0",
    "tabulate >= 0.8.2",
    "Click >= 7.0",
    "quantiphy >= 2.10.0",
    "PyYAML >= 3.13",
]

# Extra dependencies.
EXTRAS = {
    "test": [
        "pytest",
    ],
    "dev": [
        "pylint",
        "bandit",
    ]
}

setup(
    name="resfind",
    version="0.1.0",
    description="Standard resistor network finder",
    long_description=README,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        "resfind.config": ["resfind.yaml.dist", "resfind.yaml.dist.default"]
    },
    entry_points={
        "console_scripts": [
            "%s = resfind.__main__:cli" % "resfind"
        ]
    },
    install_requires=REQUIREMENTS,
    extras_require=EXTRAS,
    python_requires=">=3.9",
    license="GPLv3",
    zip_safe=False,
    classifiers=[
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Natural Language :: English",
        "Programming Language :: Python :: 3",
    ]
)
