"""
Interfaz gráfica de la calculadora básica.

Usa tkinter. Toda la lógica vive en CalculatorViewModel; aquí solo se
traducen botones y teclas a acciones y se vuelve a pintar la sesión.
"""

import logging
import tkinter as tk
from tkinter import font as tkfont

from calculator_actions import action_from_key
from calculator_view_model import CalculatorViewModel


logger = logging.getLogger(__name__)


class CalculatorApp:
    """Ventana principal de la calculadora."""

    # ── Paleta de colores ────────────────────────────────────────
    C = {
        "bg":          "#000000",
        "display_bg":  "#000000",
        "num":         "#3A3A3C",
        "num_fg":      "#FFFFFF",
        "op":          "#00BCD4",
        "op_fg":       "#000000",
        "special":     "#A5A5A5",
        "special_fg":  "#000000",
        "history_fg":  "#8E8E93",
        "expr_fg":     "#FFFFFF",
    }

    # ── Definiciones del teclado ─────────────────────────────────
    #  Cada fila es una lista de (texto, tecla, tipo_color, columnas)

    KEYPAD = [
        [("AC", "AC", "special", 2), ("Del", "Del", "special", 1),
         ("÷", "/", "op", 1)],

        [("7", "7", "num", 1), ("8", "8", "num", 1),
         ("9", "9", "num", 1), ("x", "x", "op", 1)],

        [("4", "4", "num", 1), ("5", "5", "num", 1),
         ("6", "6", "num", 1), ("-", "-", "op", 1)],

        [("1", "1", "num", 1), ("2", "2", "num", 1),
         ("3", "3", "num", 1), ("+", "+", "op", 1)],

        [("0", "0", "num", 2), (".", ".", "num", 1),
         ("=", "=", "op", 1)],
    ]

    COLUMNS = 4
    HISTORY_ROWS = 6

    # ────────────────────────────────────────────────────────────

    def __init__(self, root: tk.Tk, view_model=None):
        self.root = root
        self.root.title("Calculadora")
        self.root.configure(bg=self.C["bg"])

        self.view_model = (view_model if view_model is not None
                           else CalculatorViewModel())

        self._init_fonts()
        self._create_display()
        self._create_keypad()
        self._bind_keyboard()

        self.view_model.subscribe(lambda _session: self._render())
        self._render()

    # ── Fuentes ──────────────────────────────────────────────────

    def _init_fonts(self):
        self._f_history = tkfont.Font(family="Segoe UI", size=16, weight="normal")
        self._f_expr    = tkfont.Font(family="Segoe UI", size=30, weight="normal")
        self._f_btn     = tkfont.Font(family="Segoe UI", size=18)

    # ── Pantalla ─────────────────────────────────────────────────

    def _create_display(self):
        frame = tk.Frame(self.root, bg=self.C["display_bg"], padx=12, pady=8)
        frame.pack(fill="both", expand=True, padx=6, pady=(6, 2))

        # Historial: el más reciente queda abajo, junto a la operación
        self.history_list = tk.Listbox(
            frame, font=self._f_history, height=self.HISTORY_ROWS,
            bg=self.C["display_bg"], fg=self.C["history_fg"],
            selectbackground=self.C["display_bg"],
            highlightthickness=0, relief="flat", bd=0,
            justify="right", activestyle="none",
        )
        self.history_list.pack(fill="both", expand=True)

        self.expr_var = tk.StringVar()
        tk.Label(
            frame, textvariable=self.expr_var, font=self._f_expr,
            bg=self.C["display_bg"], fg=self.C["expr_fg"],
            anchor="e", justify="right",
        ).pack(fill="x", pady=(8, 4))

    # ── Teclado ──────────────────────────────────────────────────

    def _create_keypad(self):
        frame = tk.Frame(self.root, bg=self.C["bg"])
        frame.pack(fill="both", padx=6, pady=(2, 6))

        for c in range(self.COLUMNS):
            frame.columnconfigure(c, weight=1, uniform="key")

        for r, row_def in enumerate(self.KEYPAD):
            col_pos = 0
            for text, key, kind, span in row_def:
                btn = tk.Button(
                    frame, text=text, font=self._f_btn,
                    bg=self.C[kind], fg=self.C[f"{kind}_fg"],
                    activebackground=self.C["special"], relief="flat",
                    command=lambda k=key: self._on_key(k),
                )
                btn.grid(row=r, column=col_pos, columnspan=span,
                         sticky="nsew", padx=2, pady=2, ipady=10)
                col_pos += span
            frame.rowconfigure(r, weight=1)

    # ── Atajos de teclado ────────────────────────────────────────

    def _bind_keyboard(self):
        self.root.bind("<Key>", self._on_keyboard)

    def _on_keyboard(self, event):
        key = event.char if event.char and event.char.isprintable() else event.keysym
        try:
            action = action_from_key(key)
        except ValueError:
            logger.debug("Tecla ignorada: %r", event.keysym)
            return
        self.view_model.on_action(action)

    # ── Acciones ─────────────────────────────────────────────────

    def _on_key(self, key: str):
        self.view_model.on_action(action_from_key(key))

    def _render(self):
        self.expr_var.set(str(self.view_model.state))

        self.history_list.delete(0, tk.END)
        for entry in reversed(self.view_model.history):
            self.history_list.insert(tk.END, str(entry))
        self.history_list.see(tk.END)
