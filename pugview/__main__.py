# pugview/__main__.py
from .app import main

main()
