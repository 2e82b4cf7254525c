# Package init for fittrack.gui
