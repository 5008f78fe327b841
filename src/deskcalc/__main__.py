"""
Run with: python -m deskcalc
"""
from deskcalc.main import main

if __name__ == "__main__":
    main()
