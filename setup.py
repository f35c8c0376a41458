"""Setup script for the homepage builder package."""
from setuptools import setup, find_packages

setup(
    name="academic-homepage",
    version="1.0.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={"homepage": ["templates/*.html"]},
    install_requires=[
        "requests>=2.25.0",
        "urllib3>=1.26.0",
        "flask>=2.0.0",
        "jinja2>=3.0.0",
        "markupsafe>=2.0.0",
        "python-dotenv>=0.19.0",
        "bibtexparser>=1.4.0,<2",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["homepage=homepage.__main__:main"],
    },
    python_requires=">=3.8",
    description="Render an academic homepage with publication cards from a BibTeX file",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    keywords="bibtex publications homepage citation",
    include_package_data=True,
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Topic :: Text Processing :: Markup :: HTML",
    ],
)
