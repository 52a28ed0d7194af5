from setuptools import setup, find_packages

setup(
    name='playnet',
    version='0.1.0',
    description='In-memory feed-forward neural network engine',
    long_description='Layered node/link networks with backpropagation, mini-batch gradient descent, '
                     'L1 pruning and compilation of trained networks to Python expressions',
    packages=find_packages(exclude=['tests', 'tests.*']),
    zip_safe=False,
    python_requires='>=3.7',
    install_requires=['numpy>=1.19.0', 'pygments>=2.0'],
    extras_require={
        'networkx': ['networkx>=2.0'],
        'test': ['pytest>=6.0', 'networkx>=2.0'],
        'all': ['networkx>=2.0'],
    },
)
