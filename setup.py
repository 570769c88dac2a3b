from setuptools import setup, find_packages
import re

# Read version from gmailrest/__init__.py
with open('gmailrest/__init__.py') as f:
    version = re.search(r'^__version__ = ["\']([^"\']+)["\']', f.read(), re.MULTILINE).group(1)

setup(
    name='gmailrest',
    version=version,
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'google-auth',
        'requests',
        'python-dotenv',
        'PyYAML',
    ],
    extras_require={
        'test': ['pytest'],
    },
    author='gmailrest developers',
    description='Thin client for the Gmail REST API: threads, labels, messages and drafts.',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
)
