#!/usr/bin/env python3
"""
Example usage of the lifegrid package.
"""

from lifegrid import GameOfLife, LifeGrid, PatternLibrary


def main():
    """Demonstrate programmatic usage of the lifegrid package."""
    grid = LifeGrid(20, 20)
    game = GameOfLife(grid)

    library = PatternLibrary()
    glider = library.get_pattern("Glider")

    glider.apply_to_grid(grid, row=2, col=2)
    game.reset(clear_grid=False)

    print("Initial state:")
    print(grid)
    print(f"Population: {game.population}")
    print()

    for _ in range(8):
        game.step()
        print(f"Generation {game.generation}:")
        print(grid)
        print()

    stats = game.get_statistics()
    print("Final statistics:")
    for key, value in stats.items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
