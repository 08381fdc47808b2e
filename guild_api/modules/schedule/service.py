from guild_api.core.errors import ScheduleNotFound
from guild_api.modules.schedule.repository import ScheduleRepository
from guild_api.modules.schedule.schemas import ScheduleCreate, ScheduleUpdate, ScheduleResponse
from typing import List

NULLABLE_FIELDS = {"days", "role_mention"}


class ScheduleService:
    def __init__(self, schedules: ScheduleRepository):
        self.schedules = schedules

    def get_all_schedules(self) -> List[ScheduleResponse]:
        return [ScheduleResponse(**row) for row in self.schedules.find_all()]

    def get_schedules_by_region(self, region: str) -> List[ScheduleResponse]:
        return [ScheduleResponse(**row) for row in self.schedules.find_by_region(region)]

    def create_schedule(self, schedule_data: ScheduleCreate) -> ScheduleResponse:
        return ScheduleResponse(**self.schedules.create(schedule_data.model_dump()))

    def update_schedule(self, schedule_id: int, schedule_data: ScheduleUpdate) -> ScheduleResponse:
        """Sparse update; null only clears the nullable columns, other nulls are ignored"""
        update_data = {
            field: value
            for field, value in schedule_data.model_dump(exclude_unset=True).items()
            if value is not None or field in NULLABLE_FIELDS
        }
        if update_data:
            row = self.schedules.update(schedule_id, update_data)
        else:
            row = self.schedules.find_by_id(schedule_id)
        if not row:
            raise ScheduleNotFound()
        return ScheduleResponse(**row)

    def delete_schedule(self, schedule_id: int) -> bool:
        return self.schedules.delete(schedule_id)
