"""Seams the pipeline is wired through; see `dispatcher.RequestDispatcher`."""
