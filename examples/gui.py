# examples/gui.py
from __future__ import annotations

import tkinter as tk
from tkinter import ttk, messagebox

from cg2d import GeometryError, Tetrahedron, Triangle
from cg2d.config import format_area, format_volume
from cg2d.geom import Pt
from cg2d.plot import draw_tetrahedron, draw_triangle

import matplotlib
matplotlib.use("TkAgg")
from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg


def parse_point(text: str, name: str) -> Pt:
    """
    Парсить точку "x y" або "x, y".
    """
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        raise ValueError(f"{name}: очікується 2 числа, отримано: {len(parts)}")
    try:
        x, y = map(float, parts)
    except ValueError:
        raise ValueError(f"{name}: не вдалось прочитати числа '{text.strip()}'")
    return Pt(x, y)


class ShapesApp(tk.Tk):
    def __init__(self):
        super().__init__()
        self.title("cg2d: triangle & tetrahedron")
        self.geometry("640x720")

        self.fig = None
        self.ax = None
        self.canvas = None

        self._build_widgets()

    def _build_widgets(self):
        main = ttk.Frame(self, padding=10)
        main.pack(fill="both", expand=True)

        # --- Вершини ---
        input_frame = ttk.LabelFrame(main, text="Вершини (x y)")
        input_frame.pack(fill="x", pady=5)

        self.entries = {}
        defaults = [("V1", "0 0"), ("V2", "3 0"), ("V3", "0 4"), ("Apex", "1 1")]
        for row, (name, value) in enumerate(defaults):
            ttk.Label(input_frame, text=f"{name}:").grid(row=row, column=0, sticky="w", padx=5, pady=2)
            entry = ttk.Entry(input_frame, width=16)
            entry.insert(0, value)
            entry.grid(row=row, column=1, sticky="w", padx=5, pady=2)
            self.entries[name] = entry

        ttk.Label(input_frame, text="Висота:").grid(row=4, column=0, sticky="w", padx=5, pady=2)
        self.height_entry = ttk.Entry(input_frame, width=16)
        self.height_entry.insert(0, "5")
        self.height_entry.grid(row=4, column=1, sticky="w", padx=5, pady=2)

        self.check_plane = tk.BooleanVar(value=False)
        ttk.Checkbutton(
            input_frame,
            text="Відхиляти apex у площині основи",
            variable=self.check_plane,
        ).grid(row=5, column=0, columnspan=2, sticky="w", padx=5, pady=2)

        # --- Режим ---
        mode_frame = ttk.LabelFrame(main, text="Фігура")
        mode_frame.pack(fill="x", pady=5)

        self.shape_mode = tk.StringVar(value="tetrahedron")
        ttk.Radiobutton(
            mode_frame, text="Трикутник", variable=self.shape_mode,
            value="triangle", command=self._update_mode_state,
        ).grid(row=0, column=0, sticky="w", padx=5, pady=2)
        ttk.Radiobutton(
            mode_frame, text="Тетраедр", variable=self.shape_mode,
            value="tetrahedron", command=self._update_mode_state,
        ).grid(row=0, column=1, sticky="w", padx=5, pady=2)

        run_btn = ttk.Button(main, text="Обчислити", command=self.run_shape)
        run_btn.pack(fill="x", pady=10)

        # --- Результати ---
        result_frame = ttk.LabelFrame(main, text="Результати")
        result_frame.pack(fill="x", pady=5)

        self.area_var = tk.StringVar(value="—")
        self.volume_var = tk.StringVar(value="—")

        ttk.Label(result_frame, text="Площа основи:").grid(row=0, column=0, sticky="w", padx=5, pady=2)
        ttk.Label(result_frame, textvariable=self.area_var).grid(row=0, column=1, sticky="w", padx=5, pady=2)

        ttk.Label(result_frame, text="Об'єм:").grid(row=1, column=0, sticky="w", padx=5, pady=2)
        ttk.Label(result_frame, textvariable=self.volume_var).grid(row=1, column=1, sticky="w", padx=5, pady=2)

        # --- Графік ---
        plot_frame = ttk.LabelFrame(main, text="Візуалізація (площина основи)")
        plot_frame.pack(fill="both", expand=True, pady=5)

        self.fig = Figure(figsize=(4, 4))
        self.ax = self.fig.add_subplot(111)
        self.canvas = FigureCanvasTkAgg(self.fig, master=plot_frame)
        self.canvas.draw()
        self.canvas.get_tk_widget().pack(fill="both", expand=True)

        self._update_mode_state()

    def _update_mode_state(self):
        """
        Apex і висота потрібні лише для тетраедра.
        """
        state = "normal" if self.shape_mode.get() == "tetrahedron" else "disabled"
        self.entries["Apex"].configure(state=state)
        self.height_entry.configure(state=state)

    def run_shape(self):
        try:
            base = [parse_point(self.entries[n].get(), n) for n in ("V1", "V2", "V3")]
            if self.shape_mode.get() == "tetrahedron":
                apex = parse_point(self.entries["Apex"].get(), "Apex")
                height = float(self.height_entry.get())
        except ValueError as e:
            messagebox.showerror("Помилка вводу", str(e))
            return

        self.ax.clear()
        try:
            if self.shape_mode.get() == "triangle":
                shape = Triangle()
                shape.set_coordinates(*base)
                draw_triangle(self.ax, shape)
                self.area_var.set(format_area(shape.calculate_area()))
                self.volume_var.set("—")
            else:
                shape = Tetrahedron(check_apex_plane=self.check_plane.get())
                shape.set_coordinates(*base, apex, height)
                draw_tetrahedron(self.ax, shape)
                self.area_var.set(format_area(shape.calculate_area()))
                self.volume_var.set(format_volume(shape.calculate_volume()))
        except GeometryError as e:
            self.area_var.set("—")
            self.volume_var.set("—")
            self.ax.set_title("Немає фігури")
            self.canvas.draw()
            messagebox.showerror("Некоректна геометрія", str(e))
            return

        self.canvas.draw()


if __name__ == "__main__":
    app = ShapesApp()
    app.mainloop()
