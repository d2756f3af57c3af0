from setuptools import find_packages, setup

setup(
    name="xutils",
    version="0.0.1b0",
    description="xutils",
    keywords="utilities, base conversion, floating point, decimal, sexagesimal, calendar",
    packages=find_packages(include=["xutils", "xutils.*"]),
    python_requires=">=3.8",
    install_requires=[
        "anyascii",
        "chanfig",
        "lazy-imports",
        "numpy",
    ],
    extras_require={
        "tests": ["pytest"],
    },
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Intended Audience :: Developers",
        "Operating System :: OS Independent",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
