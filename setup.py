"""
Setup file.
"""

import os

from setuptools import find_packages, setup

URL = "https://github.com/bundlio/bundlio"
KEYWORDS = "javascript css bundler minifier static assets build packages"
HERE = os.path.dirname(os.path.abspath(__file__))


if __name__ == "__main__":
    setup(
        name="bundlio",
        version="0.1.0",
        description="Static asset bundler for script and stylesheet packages",
        keywords=KEYWORDS,
        url=URL,
        package_dir={"": "src"},
        packages=find_packages(where="src"),
        python_requires=">=3.8",
        install_requires=[
            "rjsmin",
            "rcssmin",
        ],
        extras_require={
            "test": ["pytest"],
        },
        entry_points={
            "console_scripts": [
                "bundlio=bundlio.cli:main",
            ],
        },
        include_package_data=True)
