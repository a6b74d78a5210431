"""Flight network graph and the algorithms that run over it."""

from flightnet.network.graph import Edge, Graph, Vertex                     # noqa: F401
from flightnet.network.routes import Route                                  # noqa: F401
from flightnet.network.analysis import Reach                                # noqa: F401
