"""Runtime manifests and the discovery and installation of the Java runtime the game needs."""