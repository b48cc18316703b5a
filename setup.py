from setuptools import setup, find_packages
import fungus


with open('readme.rst') as f:
    long_description = f.read()


setup(
    name='fungus',
    description="A befunge interpreter and debugger implemented in pure Python",
    long_description=long_description,
    version=fungus.__version__,
    include_package_data=True,
    packages=find_packages(exclude=["*.test.*", "test"]),
    package_data={'': ["*.rst"]},
    python_requires='>=3.6',
    install_requires=[
        'prompt_toolkit>=3.0',
        'Pygments',
    ],
    extras_require={
        'test': ['pytest', 'hypothesis'],
    },
    entry_points={
        'console_scripts': [
            'fungus-run = fungus.cli.run:run',
        ]
    },
    license='BSD',
    classifiers=[
        'License :: OSI Approved :: BSD License',
        'Development Status :: 3 - Alpha',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Topic :: Software Development :: Interpreters',
        'Topic :: Software Development :: Debuggers',
    ]
)
