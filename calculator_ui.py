"""
Interfaz gráfica de la calculadora.

Usa tkinter. Solo presenta: cada botón o tecla llama a una operación
del motor de entrada y después la pantalla se redibuja a partir de
``engine.snapshot()``.
"""

import tkinter as tk
from tkinter import font as tkfont

from entry_engine import DivideByZero, EntryEngine, EntryError
from keyboard_map import action_for_key, dispatch_key


# ═════════════════════════════════════════════════════════════════
#  Aplicación principal
# ═════════════════════════════════════════════════════════════════

class CalculatorApp:
    """Ventana principal de la calculadora."""

    PULSE_MS = 100          # duración del efecto de botón pulsado

    # ── Paleta de colores ────────────────────────────────────────
    C = {
        "bg":         "#1E1E2E",
        "display_bg": "#181825",
        "num":        "#313244",
        "num_fg":     "#CDD6F4",
        "op":         "#F38BA8",
        "op_fg":      "#1E1E2E",
        "special":    "#585B70",
        "special_fg": "#CDD6F4",
        "equals":     "#89B4FA",
        "equals_fg":  "#1E1E2E",
        "active":     "#7F849C",
        "expr_fg":    "#BAC2DE",
        "result_fg":  "#A6E3A1",
        "warning_fg": "#F9E2AF",
        "error_fg":   "#F38BA8",
    }

    # ── Definiciones del teclado ─────────────────────────────────
    #  Cada fila es una lista de (texto, acción, tipo_color)
    #  acción: "digit:<d>", "op:<operación>", "decimal", "equals",
    #          "clear", "backspace"

    KEYPAD = [
        [("AC", "clear", "special"), ("⌫", "backspace", "special"),
         ("/", "op:divide", "op"), ("×", "op:multiply", "op")],

        [("7", "digit:7", "num"), ("8", "digit:8", "num"),
         ("9", "digit:9", "num"), ("−", "op:subtract", "op")],

        [("4", "digit:4", "num"), ("5", "digit:5", "num"),
         ("6", "digit:6", "num"), ("+", "op:add", "op")],

        [("1", "digit:1", "num"), ("2", "digit:2", "num"),
         ("3", "digit:3", "num"), ("=", "equals", "equals")],

        [("0", "digit:0", "num"), (".", "decimal", "num")],
    ]

    # ────────────────────────────────────────────────────────────

    def __init__(self, root: tk.Tk, engine=None):
        self.root = root
        self.root.title("Calculadora")
        self.root.configure(bg=self.C["bg"])
        self.root.resizable(False, False)

        self.engine = engine if engine is not None else EntryEngine()
        self._buttons: dict[str, tk.Button] = {}
        self._button_kinds: dict[str, str] = {}

        self._init_fonts()
        self._create_display()
        self._create_keypad()
        self._bind_keyboard()
        self._refresh()

    # ── Fuentes ──────────────────────────────────────────────────

    def _init_fonts(self):
        self._f_prev   = tkfont.Font(family="Consolas", size=14)
        self._f_result = tkfont.Font(family="Consolas", size=26, weight="bold")
        self._f_btn    = tkfont.Font(family="Segoe UI", size=16)
        self._f_small  = tkfont.Font(family="Segoe UI", size=10)

    # ── Pantalla ─────────────────────────────────────────────────

    def _create_display(self):
        frame = tk.Frame(self.root, bg=self.C["display_bg"], padx=12, pady=8)
        frame.pack(fill="x", padx=6, pady=(6, 2))

        # Operando anterior + operación pendiente
        self.previous_var = tk.StringVar()
        tk.Label(
            frame, textvariable=self.previous_var, font=self._f_prev,
            bg=self.C["display_bg"], fg=self.C["expr_fg"], anchor="e",
        ).pack(fill="x")

        self.current_var = tk.StringVar(value="0")
        tk.Label(
            frame, textvariable=self.current_var, font=self._f_result,
            bg=self.C["display_bg"], fg=self.C["result_fg"], anchor="e",
        ).pack(fill="x")

        # Avisos (límite de dígitos) y errores (división entre cero)
        self.message_var = tk.StringVar()
        self.message_label = tk.Label(
            frame, textvariable=self.message_var, font=self._f_small,
            bg=self.C["display_bg"], fg=self.C["warning_fg"], anchor="w",
        )
        self.message_label.pack(fill="x")

    # ── Teclado ──────────────────────────────────────────────────

    def _create_keypad(self):
        frame = tk.Frame(self.root, bg=self.C["bg"])
        frame.pack(fill="both", expand=True, padx=6, pady=(2, 6))

        max_cols = max(len(row) for row in self.KEYPAD)
        for c in range(max_cols):
            frame.columnconfigure(c, weight=1, uniform="key")

        for r, row_def in enumerate(self.KEYPAD):
            spans = self._compute_spans(len(row_def), max_cols)
            col_pos = 0
            for idx, (text, action, kind) in enumerate(row_def):
                btn = tk.Button(
                    frame, text=text, font=self._f_btn,
                    bg=self.C[kind], fg=self.C[f"{kind}_fg"],
                    activebackground=self.C["active"], relief="flat",
                    command=lambda a=action: self._on_button(a),
                )
                btn.grid(row=r, column=col_pos, columnspan=spans[idx],
                         sticky="nsew", padx=2, pady=2, ipady=10)
                self._buttons[action] = btn
                self._button_kinds[action] = kind
                col_pos += spans[idx]

        for r in range(len(self.KEYPAD)):
            frame.rowconfigure(r, weight=1)

    @staticmethod
    def _compute_spans(cols_in_row: int, max_cols: int) -> list[int]:
        """Reparte max_cols entre cols_in_row botones."""
        base, extra = divmod(max_cols, cols_in_row)
        spans = [base] * cols_in_row
        spans[-1] += extra
        return spans

    # ── Atajos de teclado ────────────────────────────────────────

    def _bind_keyboard(self):
        self.root.bind("<Key>", self._on_keypress)

    def _on_keypress(self, event):
        key = event.keysym
        if action_for_key(key) is None and event.char:
            key = event.char
        if action_for_key(key) is None:
            return None
        self._run(dispatch_key, self.engine, key)
        return "break"

    # ── Acciones ─────────────────────────────────────────────────

    def _on_button(self, action: str):
        btn = self._buttons.get(action)
        if btn is not None:
            self._pulse(btn, self._button_kinds.get(action, "num"))
        self._on_key(action)

    def _on_key(self, action: str):
        engine = self.engine
        if action == "clear":
            self._run(engine.clear)
        elif action == "backspace":
            self._run(engine.delete_last_digit)
        elif action == "equals":
            self._run(engine.calculate)
        elif action == "decimal":
            self._run(engine.append_decimal)
        elif action.startswith("digit:"):
            self._run(engine.append_digit, action[6:])
        elif action.startswith("op:"):
            self._run(engine.choose_operation, action[3:])

    def _run(self, fn, *args):
        try:
            fn(*args)
        except EntryError as exc:
            kind = "error" if isinstance(exc, DivideByZero) else "warning"
            self._show_message(str(exc), kind)
        else:
            self._show_message("")
        self._refresh()

    # ── Pantalla: refresco ───────────────────────────────────────

    def _refresh(self):
        snapshot = self.engine.snapshot()
        self.current_var.set(snapshot.display_operand)
        self.previous_var.set(snapshot.pending_label)

    def _show_message(self, text: str, kind: str = "warning"):
        if text:
            prefix = "Error: " if kind == "error" else ""
            self.message_var.set(f"{prefix}{text}")
            self.message_label.config(fg=self.C[f"{kind}_fg"])
        else:
            self.message_var.set("")

    def _pulse(self, btn, kind: str):
        # Color de la paleta, no el actual: puede seguir activo
        btn.config(bg=self.C["active"])
        self.root.after(self.PULSE_MS, lambda: btn.config(bg=self.C[kind]))
