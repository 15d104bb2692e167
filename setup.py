from setuptools import find_namespace_packages, setup

setup(
    name="xssencode",
    version="0.3.0",
    description="Context-aware output encoders for XSS prevention",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "click>=8.1",
        "rich>=13.0",
        "rich-click>=1.7",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "xssencode=xssencode.cli.main:cli",
        ],
    },
    zip_safe=False,
)
