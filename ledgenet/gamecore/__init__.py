"""Game state shared by server and client: vectors, actors, terrain, the world and its players."""