from setuptools import find_packages, setup

__VERSION__ = '0.1.0'

with open("README.rst", "r") as fh:
    long_description = fh.read()

setup(
    name='pyaxmltree',
    version=__VERSION__,

    author='pyaxmltree contributors',
    license='Apache License 2.0',

    packages=find_packages(exclude=['tests', 'tests.*']),
    include_package_data=True,
    zip_safe=False,
    platforms='any',
    python_requires='>=3.6',
    install_requires=['lxml'],
    extras_require={
        'test': ['pytest'],
    },
    description="Decoder for Android binary XML (AXML) into an element tree",
    long_description=long_description,
    long_description_content_type="text/x-rst",
    keywords='axml axmlparser android manifest binary xml',
    classifiers=[
        'Development Status :: 4 - Beta',

        'Intended Audience :: Developers',

        'License :: OSI Approved :: Apache Software License',

        'Operating System :: POSIX',
        'Operating System :: MacOS',
        'Operating System :: Unix',

        'Programming Language :: Python',
        'Programming Language :: Python :: 3',

        'Topic :: Software Development :: Libraries :: Python Modules',
    ]
)
