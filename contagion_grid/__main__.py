from contagion_grid.cli import main

main()
