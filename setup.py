# setup.py

from setuptools import setup, find_packages

setup(
    name="node-load-balancer",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'balance-nodes=node_balancer.cli:main',
        ],
    },
    author="Your Name",
    author_email="your.email@example.com",
    description="Network node metrics tracking and task redistribution planning",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    keywords="load-balancing metrics task-redistribution",
    python_requires=">=3.8",
)
