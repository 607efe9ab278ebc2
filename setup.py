from setuptools import setup, find_packages

setup(
    name="exactgauss",
    version="1.0",
    description="Exact Gaussian elimination of linear systems with rational arithmetic",
    long_description=("Gauss-Jordan elimination of augmented matrices over exact fractions, with column-completion "
                      "notifications and conversions from and to Python fractions, sympy, numpy and scipy"),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.7",
    packages=find_packages(include=["exactgauss", "exactgauss.*"]),
    install_requires=["numpy", "scipy", "sympy"],
    extras_require={"test": ["pytest"]},
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["gaussian elimination", "linear systems", "rational arithmetic", "fractions"],
    zip_safe=False,
)
