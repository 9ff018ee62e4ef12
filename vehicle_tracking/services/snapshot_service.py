class SnapshotService:
    def __init__(self, store):
        self.store = store

    def get_snapshot(self):
        return self.store.list_all()
