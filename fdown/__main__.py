"""Allow ``python -m fdown``."""

from fdown.main import main

if __name__ == '__main__':
    main()
