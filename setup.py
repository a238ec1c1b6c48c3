from setuptools import find_packages, setup


with open('src/tmp_env/_version.py') as fp:
    # defines __version__
    exec(fp.read())


with open('README.rst') as fp:
    README = fp.read()


setup(
    name='tmp-env',
    version=__version__,
    description='Temporary working directories, environment variables and tmp dirs, restored automatically',
    long_description=README,
    license='MIT',
    packages=find_packages('src'),
    package_dir={'': 'src'},
    install_requires=[],
    extras_require={
        'tests': [
            'pytest',
        ],
    },
    python_requires='>=3.6',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Testing',
    ],
    keywords='testing environment cwd tempdir',
)
