from setuptools import setup

setup(
    name="degrunge",
    version="0.1.0",
    description="Replace the grunge texture of an SVG logo with a plain rectangle",
    author="Stephan",
    package_dir={"": "degrunge"},
    py_modules=["degrunge"],
    install_requires=[
        "click>=8.1.8",
        "tqdm",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "degrunge=degrunge:degrunge",
        ],
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Topic :: Multimedia :: Graphics",
        "Topic :: Utilities",
    ],
)
