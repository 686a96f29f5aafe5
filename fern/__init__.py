# ids are assigned by the Fern API, the reporter always sends 0
NEW_ID = 0
