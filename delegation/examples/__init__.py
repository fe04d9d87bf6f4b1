# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Two bindings of the same delegation mechanism.

- :mod:`.bakery` - a plain holder notifying a single delegate.
- :mod:`.menu` - a list view asking a data source and notifying a delegate,
  owned by a controller that forwards selections to its own delegate.
"""
