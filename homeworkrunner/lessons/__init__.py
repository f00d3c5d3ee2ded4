"""Lesson functions showing what each homework exercise builds."""