from setuptools import find_namespace_packages, setup

# with open("README.md", "r") as fh:
#     long_description = fh.read()

setup(
    name="smg-heap",
    version="0.0.1",
    author="Stuart Golodetz",
    author_email="stuart.golodetz@cs.ox.ac.uk",
    description="A binary heap whose elements can be repositioned after their priorities change",
    long_description="",  #long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/sgolodetz/smg-heap",
    packages=find_namespace_packages(include=["smg.heap", "smg.heap.*"]),
    include_package_data=True,
    install_requires=[],
    extras_require={
        "test": ["numpy", "pytest"]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.6',
)
