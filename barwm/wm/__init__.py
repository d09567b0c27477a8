"""Clients, monitors, layouts and the dynamic tiling window manager model."""