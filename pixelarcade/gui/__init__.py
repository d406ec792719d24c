"""Stacked menus, buttons, labels and text boxes for the game screens."""