# snake/__main__.py
from snake.main import main

main()
