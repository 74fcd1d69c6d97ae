import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="planegeom",
    version="0.1",
    description="Points and free vectors in the plane, with robust orientation and bearing arithmetic",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=["planegeom", "planegeom.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.10',
    install_requires=[
        "attrs",
        "expression>=5.0",
        "numpy",
        "pyyaml",
    ],
    extras_require={
        "test": [
            "hypothesis",
            "pytest",
        ],
    },
)
