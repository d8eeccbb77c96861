# AssetLint shared libraries
