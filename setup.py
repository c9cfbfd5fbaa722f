from setuptools import setup, find_packages

setup(
    name="pycirclehough",
    version="0.1",
    description="Weighted circle Hough transform for laser scan profiles",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        'numpy',
        'scipy',
    ],
    extras_require={
        'io': ['open3d'],
        'test': ['pytest'],
    },
    python_requires=">=3.8",
)
