from __future__ import annotations

from gojsgen.cli import main

if __name__ == "__main__":
    main()
