"""Reading and writing floorplan files."""
