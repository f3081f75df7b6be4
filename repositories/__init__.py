"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates the SQL for one record table.
Repositories receive raw rows from the database and return domain model objects.
"""

from models.record_type import RecordType
from repositories.alert_repo import AlertRepository
from repositories.camera_repo import CameraRepository
from repositories.personal_data_repo import PersonalDataRepository
from repositories.vehicular_repo import VehicularRepository

# Shared by every service instance; one repository per record type.
REPOSITORIES = {
    RecordType.ALERT: AlertRepository(),
    RecordType.PERSONAL_DATA: PersonalDataRepository(),
    RecordType.VEHICULAR: VehicularRepository(),
    RecordType.CAMERA: CameraRepository(),
}
