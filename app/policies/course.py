from app.db import User, Course


class CoursePolicy:
    @classmethod
    def build_owner_condition(cls, user: User):
        """Фильтр для изменения курса: только создатель.

        Проверка живет в WHERE, а не отдельным 403, поэтому чужой курс
        для вызывающего просто не существует.
        """
        return Course.creator_id == user.id
