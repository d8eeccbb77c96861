# AssetLint core
