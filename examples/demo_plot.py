# examples/demo_plot.py
from cg2d import Pt, Tetrahedron
from cg2d.plot import draw_tetrahedron

from matplotlib.figure import Figure

if __name__ == "__main__":
    tetra = Tetrahedron()
    tetra.set_coordinates(Pt(0, 0), Pt(3, 0), Pt(0, 4), Pt(1, 1), 5.0)

    fig = Figure(figsize=(4, 4))
    ax = fig.add_subplot(111)
    draw_tetrahedron(ax, tetra)
    fig.savefig("tetrahedron.png", dpi=120)
    print("Wrote tetrahedron.png")
