"""Example programs: pong, constellations, an empty template and an image viewer."""