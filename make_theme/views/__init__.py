"""View definitions - named page contexts and the predicates that detect them.

A view maps a key (e.g. 'page', 'archive') to a label, a display predicate
and a priority. The current view is the last view, in priority order,
whose predicate matches the current query.
"""
