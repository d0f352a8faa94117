from ledger.extensions import db


class Reader(db.Model):
    __tablename__ = "readers"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False, unique=True, index=True)
    phone = db.Column(db.String(20), nullable=True)

    def to_dict(self):
        return {"id": self.id, "name": self.name, "phone": self.phone}
