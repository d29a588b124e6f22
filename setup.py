#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from setuptools import setup, find_packages
from pathlib import Path

setup(
    name='image-book-converter',
    version='1.0.0',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    install_requires=[
        'chardet>=5.2.0',
        'filelock>=3.12.0',
        'pyyaml>=6.0.2',
        'reportlab>=4.0.0',
        'rich>=14.0.0',
    ],
    extras_require={
        'test': [
            'pytest>=8.0.0',
            'pillow>=10.0.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'image-book-pdf=image_book_converter.image_book_cli:main_pdf',
            'image-book-epub=image_book_converter.image_book_cli:main_epub',
            'image-book-merge-pdf=image_book_converter.image_book_cli:main_merge_pdf',
            'image-book-merge-epub=image_book_converter.image_book_cli:main_merge_epub',
            'image-book-analyze=image_book_converter.image_book_cli:main_analyze',
        ],
    },
    author='Emasoft',
    author_email='713559+Emasoft@users.noreply.github.com',
    description='Image Book Converter: batch conversion of folders of numbered images into PDF and EPUB documents',
    long_description=open('README.md').read() if Path('README.md').exists() else '',
    long_description_content_type='text/markdown',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: OS Independent',
        'Development Status :: 4 - Beta',
        'Intended Audience :: End Users/Desktop',
        'Topic :: Multimedia :: Graphics :: Graphics Conversion',
    ],
    python_requires='>=3.10',
)
