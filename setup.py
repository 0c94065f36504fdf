import setuptools

setuptools.setup(
	name='forestry',
	version='0.1.0',
	packages=[
		'forestry',
		'forestry.parsing',
		'forestry.rendering',
		'forestry.support',
	],
	description='Find every parse tree of a sentence under any context-free grammar',
	long_description=open('README.md', encoding='utf-8').read(),
	long_description_content_type="text/markdown",
	python_requires='>=3.9',
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Software Development :: Compilers",
		"Development Status :: 3 - Alpha",
	],
)
