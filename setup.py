from setuptools import find_packages, setup

setup(
    name="bls_algebra",
    version="0.1.0",
    description="Prime field and Short-Weierstrass elliptic curve arithmetic for pairing-friendly curves",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.12",
)
