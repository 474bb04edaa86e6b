from setuptools import setup, find_packages
import os
from glob import glob

package_name = 'vision_target_tracker'

setup(
    name=package_name,
    version='1.0.0',
    packages=find_packages(exclude=['test', 'test.*']),
    data_files=[
        # Config files
        (os.path.join('share', package_name, 'config'),
            glob('config/*.yaml')),
    ],
    install_requires=[
        'setuptools',
        'numpy',
        'PyYAML',
    ],
    extras_require={
        'test': ['pytest'],
    },
    zip_safe=True,
    maintainer='Your Name',
    maintainer_email='your.email@example.com',
    description='Best-target selection and range estimation for segmented camera particles',
    license='Apache-2.0',
)
