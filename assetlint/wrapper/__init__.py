# AssetLint wrapper
