import setuptools

setuptools.setup(
	name='tie-symbol',
	version='0.1.0',
	packages=[
		'tiesymbol',
	],
	description='A dictionary-like view over a tree of sigil-typed namespace bindings',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Software Development :: Libraries",
		"Development Status :: 3 - Alpha",
    ],
	python_requires='>=3.9',
)
