#!/usr/bin/env python

import setuptools

readme = open('README.md').read()
requirements = open("requirements.txt").readlines()
test_requirements = open("requirements-test.txt").readlines()

setuptools.setup(
    name = 'nest-mqtt',
    version = '0.1.0',
    description = "Nest smoke detector -> MQTT bridge server",
    long_description = readme,
    long_description_content_type = "text/markdown",
    packages = setuptools.find_packages(exclude=["tests*"]),
    scripts = ['scripts/nest-mqtt'],
    include_package_data = True,
    package_data = {'nest_mqtt' : ['data/*.yaml']},
    install_requires = requirements,
    extras_require = {'test' : test_requirements},
    license = "GNU General Public License v3",
    classifiers = [
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
    ],
    python_requires = '>=3.8',
    # avoid eggs
    zip_safe = False,
)
