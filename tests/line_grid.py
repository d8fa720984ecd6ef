class LineGrid:
    """Cells along latitude 30, one per degree of longitude.

    Each cell touches its left and right neighbour.
    """

    def __init__(self, n):
        self.ids = [f"c{i:03d}" for i in range(n)]

    def base_cells(self):
        return set(self.ids)

    def children(self, cell, resolution):
        return {cell}

    def neighbors(self, cell, ring=1):
        i = int(cell[1:])
        lo, hi = max(0, i - ring), min(len(self.ids), i + ring + 1)
        return set(self.ids[lo:hi])

    def centroid(self, cell):
        return 30.0, -179.5 + int(cell[1:])
