from mcschem import BlockIdentifier
from mcschem.core.grid import VoxelGrid
from mcschem.core.palette import PaletteBuilder


def test_first_seen_order(small_schematic):
    palette = PaletteBuilder.build(small_schematic.grid)

    assert palette.mapping() == {
        "minecraft:air": 0,
        "minecraft:dirt": 1,
        "minecraft:grass_block": 2,
        "minecraft:stone": 3,
    }
    assert palette.max_index == 3
    assert len(palette.indices) == 27


def test_index_stream_follows_traversal(small_schematic):
    palette = PaletteBuilder.build(small_schematic.grid)
    expected = [0] * 27
    expected[1] = 1   # dirt at (1, 0, 0)
    expected[3] = 2   # grass at (0, 0, 1)
    expected[9] = 3   # stone at (0, 1, 0)
    assert palette.indices.tolist() == expected


def test_equal_blocks_share_an_entry():
    grid = VoxelGrid(2, 1, 1)
    grid.set(0, 0, 0, BlockIdentifier.parse("minecraft:chest[type=single,facing=north]"))
    grid.set(1, 0, 0, BlockIdentifier("minecraft:chest", {"facing": "north", "type": "single"}))

    palette = PaletteBuilder.build(grid)
    assert palette.mapping() == {"minecraft:chest[facing=north,type=single]": 0}
    assert palette.indices.tolist() == [0, 0]


def test_deterministic(small_schematic):
    first = PaletteBuilder.build(small_schematic.grid)
    second = PaletteBuilder.build(small_schematic.grid)
    assert first.mapping() == second.mapping()
    assert first.indices.tolist() == second.indices.tolist()


def test_large_palette():
    grid = VoxelGrid(300, 1, 1)
    for x in range(300):
        grid.set(x, 0, 0, BlockIdentifier("test:block", {"n": str(x)}))

    palette = PaletteBuilder.build(grid)
    assert len(palette) == 300
    assert palette.indices.tolist() == list(range(300))
