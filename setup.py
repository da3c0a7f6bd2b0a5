import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

with open("fixint/version.py", "r") as fh:
    version = fh.read().strip().strip('"')

setuptools.setup(
    name="fixint",
    version=version,
    description="Fixed-width unsigned integers stored as machine-word limbs, any base 2 to 256.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(),
    platforms=['any'],
    python_requires=">=3.6",
    extras_require={
        'test': [
            'hypothesis',
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: CC0 1.0 Universal (CC0 1.0) Public Domain Dedication",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries",
            # multi-precision
            # bignum
            # fixed width
            # radix conversion
    ],
)
