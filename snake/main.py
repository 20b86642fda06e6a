# snake/main.py
from snake.runners.run_snake import main as run_snake

def main():
    run_snake()

if __name__ == "__main__":
    main()
