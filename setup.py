from setuptools import setup, find_packages

setup(
    name='lazyseg',
    version=open("version.txt").read().strip(),
    packages=find_packages(include=["lazyseg", "lazyseg.*"]),
    python_requires=">=3.7",
    license='Apache 2.0',
    install_requires=[req for req in open("requirements.txt").read().split("\n") if len(req) > 0],
    extras_require={"test": ["pytest"]},
    description='Lazy propagation segment tree with pluggable aggregation and range update algebras',
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: Apache Software License",
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Typing :: Typed"
    ]
)
