"""Classic algorithm drills: bit tricks, dynamic programming, graphs, LCA,
shortest paths, spanning trees and big-number arithmetic."""

__version__ = "0.1.0"