"""Pipeline stages — tasks, sizing, placer.

Each stage consumes the previous stage's output.  The stages in order:

  tasks   group task-source records into per-category item buckets
  sizing  score each bucket and map the score to block dimensions
  placer  order the blocks and pack them into the canvas grid

Shared rules live in ``config`` and the per-category tables in
``categories``.
"""
