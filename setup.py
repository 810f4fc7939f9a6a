
import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

packages = setuptools.find_packages(exclude=["tests"])
print(packages)
entry_points={
    'console_scripts': [
        'revlang=revlang.__main__:main',
    ],
}
print(entry_points)

setuptools.setup(
    name="revlang",
    version="0.1.0",
    description="scanner and parser for a small reversible programming language",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=packages,
    entry_points=entry_points,
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.6',
)
