"""Release version reported by ``poke -version``."""

VERSION = "0.1.0"
