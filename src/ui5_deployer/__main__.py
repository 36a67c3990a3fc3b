"""Entry point: python -m ui5_deployer [deploy|types] [options]"""

from ui5_deployer import main

if __name__ == "__main__":
    main()
