from .wrapper.lint.cli import main

main()
