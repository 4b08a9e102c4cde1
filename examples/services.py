from dotgraph import Graph

with Graph("services") as graph:
    graph.rotate()
    graph.boxes()
    graph.font("Sans-Serif", 13) << graph.node_attribs

    graph.edge("lb", "web", "api", "db")
    graph["api"] >> "cache" >> "queue"
    graph.color("red") + graph.style("dashed") << graph.edges["api"]["queue"]

    with Graph("cluster_workers") as workers:
        workers.label("workers")
        workers.edge("queue", "worker")
        graph.fillcolor("lightgrey") << workers["worker"]

# who depends on the database?
consumers = graph.invert()
