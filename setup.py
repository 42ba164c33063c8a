from setuptools import find_packages, setup

with open("README.md", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="pynoiseflow",
    version="0.1.0",
    description="Procedural images from noise flow fields, walks and triangle tessellations",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"pynoiseflow.palette": ["assets/*.hex"]},
    include_package_data=True,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Multimedia :: Graphics",
        "Topic :: Artistic Software",
    ],
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.20.0",
        "matplotlib>=3.6.0",
        "click>=7.0",
        "pillow>=8.0.0",
        "opensimplex>=0.4",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov",
            "black",
            "flake8",
        ],
    },
    keywords="noise perlin simplex flow-field generative-art procedural",
    entry_points={
        "console_scripts": [
            "pnf-flow=pynoiseflow.cli.flow_commands:flow",
            "pnf-tris=pynoiseflow.cli.tris_commands:tris",
            "pnf-noise=pynoiseflow.cli.noise_commands:noise_debug",
            "pnf-featherweight=pynoiseflow.cli.featherweight_commands:featherweight",
            "pnf-palette=pynoiseflow.cli.palette_commands:palette",
        ],
    },
)
